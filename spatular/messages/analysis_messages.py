# spatular/messages/analysis_messages.py

# ✅ Positive
ANALYSIS_SUCCESS = "Corpus analysis completed successfully."


# ❌ Errors
ANALYSIS_NO_DOCUMENTS = "At least one document is required."
ANALYSIS_FAILED = "Corpus analysis failed due to internal server error."
