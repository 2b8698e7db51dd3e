# spatular/messages/dictionary_messages.py

# ✅ Positive
DICTIONARY_STATUS = "Dictionary status retrieved."
DICTIONARY_WORDS_ADDED = "Words added to the dictionary."
DICTIONARY_WORDS_REMOVED = "Words removed from the dictionary."
DICTIONARY_RELOADED = "Dictionary reloaded from file."


# ❌ Errors
DICTIONARY_PATH_NOT_CONFIGURED = "No dictionary file is configured."
DICTIONARY_EMPTY_REQUEST = "No valid words were provided."
