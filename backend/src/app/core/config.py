"""Application configuration."""
import os

# Claude API credential and model; the key is the only required setting
ANTHROPIC_API_KEY = os.environ.get("ANTHROPIC_API_KEY", "")
ANTHROPIC_MODEL = os.environ.get("ANTHROPIC_MODEL", "claude-3-5-sonnet-20240620")
ANTHROPIC_MAX_TOKENS = int(os.environ.get("ANTHROPIC_MAX_TOKENS", "1024"))

PDF_MEDIA_TYPE = "application/pdf"
MAX_FILE_SIZE_MB = int(os.environ.get("MAX_FILE_SIZE_MB", "32"))
MAX_FILE_SIZE = MAX_FILE_SIZE_MB * 1024 * 1024

# Batch warning banner: shown when more files than this are added at once
BATCH_WARNING_THRESHOLD = int(os.environ.get("BATCH_WARNING_THRESHOLD", "10"))
AVG_PROCESSING_TIME_PER_FILE = int(os.environ.get("AVG_PROCESSING_TIME_PER_FILE", "15"))  # seconds

CSV_EXPORT_FILENAME = "resume_contact_info.csv"
XLSX_EXPORT_FILENAME = "resume_contact_info.xlsx"
XLSX_SHEET_NAME = "Contact Info"
