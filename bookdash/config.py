"""Configuration management."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration."""

    # Dataset
    BOOKS_CSV_PATH = os.getenv("BOOKS_CSV_PATH", "books.csv")
    BOOKS_LANGUAGE = os.getenv("BOOKS_LANGUAGE", "English")

    # Charts
    TOP_GENRES_N = int(os.getenv("TOP_GENRES_N", "10"))
    YEAR_BIN_WIDTH = int(os.getenv("YEAR_BIN_WIDTH", "10"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
