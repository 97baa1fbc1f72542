"""Default prompt templates used by the workflow steps.

Each template is plain text with `{name}` placeholders rendered by
`genflow.prompting.template.render`. Steps accept a replacement template at
construction time; these are only the defaults.
"""


# =========================================================
# STANDALONE QUESTION
# =========================================================
# Variables:
#   - `history`: conversation transcript loaded from memory.
#   - `input`: the follow-up question as typed by the user.

STANDALONE_QUESTION_TEMPLATE = (
    "Given the following conversation and a follow up question, rephrase the follow up question to be a standalone\n"
    "question, in its original language.\n"
    "Chat History:\n"
    "{history}\n"
    "Follow Up Input: {input}\n"
    "Standalone question:"
)


# =========================================================
# RETRIEVAL-AUGMENTED ANSWER
# =========================================================
# Variables:
#   - `input`: the (standalone) question.
#   - `documents`: retrieved document contents, one per line, in rank order.

RAG_TEMPLATE = (
    "You are a helpful assistant, conversing with a user about the subjects contained in a set of documents.\n"
    "Use the information from the DOCUMENTS section to provide accurate answers. If unsure, simply state\n"
    "that you don't know the answer.\n"
    "QUESTION:\n"
    "{input}\n"
    "DOCUMENTS:\n"
    "{documents}"
)
