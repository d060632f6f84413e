"""
Document text extraction task using LangChain PyPDFLoader.

Writes the payload to a temp directory (Lambda uses /tmp), loads it page by
page and joins the page texts into one payload.

Dependencies: langchain_community.document_loaders
System role: Text extraction stage of document ingestion pipeline
"""

import os
import shutil
import tempfile
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from pdf_agent.core.exceptions import ParsingError

PAGE_SEPARATOR = "\n\n"


class ParsingTask:
    """Extract plain text from PDF payloads."""

    def extract(self, payload: bytes, filename: str = "document.pdf") -> str:
        """
        Extract text from a PDF payload.

        Args:
            payload: Raw PDF bytes
            filename: Source key, used for the temp file name and errors

        Returns:
            str: Extracted text, empty when the PDF has no text layer

        Raises:
            ParsingError: When the payload cannot be parsed
        """
        temp_dir = tempfile.mkdtemp(prefix="doc_pipeline_")
        local_path = os.path.join(temp_dir, Path(filename).name or "document.pdf")

        try:
            with open(local_path, "wb") as f:
                f.write(payload)

            documents = PyPDFLoader(local_path).load()
            return PAGE_SEPARATOR.join(doc.page_content for doc in documents)

        except Exception as e:
            raise ParsingError(f"Failed to parse PDF: {e}", key=filename) from e
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)
