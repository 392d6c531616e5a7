"""
File Validator Module

Gate run before any decoding: both uploads must be present, have a
spreadsheet extension and stay under the size limit.
"""

from pathlib import Path
from typing import Dict, Union

from .settings import MAX_FILE_SIZE_MB, SUPPORTED_EXTENSIONS


def validate_file_type(file_path: Union[str, Path]) -> Dict:
    """
    Check if the file extension is one we can decode.

    Returns:
        Dict with 'valid' and either 'extension' or 'error'.
    """
    path = Path(file_path) if isinstance(file_path, str) else file_path
    ext = path.suffix.lower()

    if ext not in SUPPORTED_EXTENSIONS:
        return {
            "valid": False,
            "error": f'Unsupported file format for "{path.name}". Please upload an .xlsx, .xls or .csv file.'
        }

    return {"valid": True, "extension": ext}


def validate_file_size(size_bytes: int, file_name: str) -> Dict:
    """Reject files larger than MAX_FILE_SIZE_MB."""
    size_mb = size_bytes / (1024 * 1024)
    if size_mb > MAX_FILE_SIZE_MB:
        return {
            "valid": False,
            "error": f'"{file_name}" is {size_mb:.1f} MB. The maximum supported size is {MAX_FILE_SIZE_MB} MB.'
        }
    return {"valid": True}


def validate_uploaded_file(uploaded_file, label: str) -> Dict:
    """
    Validate one uploaded file object (anything with .name and .getvalue()).

    Returns:
        {"status": "valid"} or {"status": "invalid", "reason": "..."}
    """
    if uploaded_file is None:
        return {"status": "invalid", "reason": f"No {label.lower()} file uploaded."}

    type_result = validate_file_type(uploaded_file.name)
    if not type_result["valid"]:
        return {"status": "invalid", "reason": type_result["error"]}

    size_result = validate_file_size(len(uploaded_file.getvalue()), uploaded_file.name)
    if not size_result["valid"]:
        return {"status": "invalid", "reason": size_result["error"]}

    return {"status": "valid"}


def validate_upload_pair(warehouse_file, shopify_file) -> Dict:
    """Validate the warehouse and Shopify uploads together."""
    if warehouse_file is None or shopify_file is None:
        return {"status": "invalid", "reason": "Please upload both files before processing."}

    for uploaded_file, label in ((warehouse_file, "Warehouse"), (shopify_file, "Shopify")):
        result = validate_uploaded_file(uploaded_file, label)
        if result["status"] != "valid":
            return result

    return {"status": "valid"}
