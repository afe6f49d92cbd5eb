import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    # --- Document Settings ---
    SITE_URL = os.getenv("SITE_URL", "https://localhost/")
    PDF_AUTHOR = os.getenv("PDF_AUTHOR", "Travel Registration")
    PDF_FONT_DIR = os.getenv("PDF_FONT_DIR", "")

    # --- Languages ---
    # Portuguese labels are always printed; any other language is stacked beneath
    PRIMARY_LANGUAGE = os.getenv("PRIMARY_LANGUAGE", "pt")
    FALLBACK_LANGUAGE = os.getenv("FALLBACK_LANGUAGE", "en")

    # --- Attachments ---
    IMAGE_MAX_HEIGHT_MM = float(os.getenv("IMAGE_MAX_HEIGHT_MM", "100"))
