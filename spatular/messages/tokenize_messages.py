# spatular/messages/tokenize_messages.py

# ✅ Positive
TOKENIZE_SUCCESS = "Text tokenized successfully."
NGRAM_SUCCESS = "N-grams generated successfully."
FREQUENCY_SUCCESS = "Token frequencies computed successfully."


# ❌ Errors
TEXT_TOO_LONG = "The text exceeds the maximum allowed length."
NGRAM_SIZE_INVALID = "The n-gram size is outside the allowed range."
