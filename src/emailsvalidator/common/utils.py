import os
from glob import glob
from typing import List

from emailsvalidator.common.defaults import EXCEL_FORMULA_PREFIXES


def prepare_string_for_excel(value) -> str:
    """Stringify a cell value so Excel never reads it as a formula."""
    text = "" if value is None else str(value)
    if text.startswith(EXCEL_FORMULA_PREFIXES):
        return "'" + text
    return text


def prepare_input_files(input_files: List[str]) -> List[str]:
    """Expand wildcards, drop duplicates and anything that is not a file."""
    file_names = []
    for f in input_files:
        file_names += glob(f) or [f]
    file_names = sorted(set(file_names))
    return [file for file in file_names if os.path.isfile(file)]


def print_list_with_title(title: str, items: list, file=None):
    """
    Prints a list of items with a title.

    :param title: The title for the list.
    :param items: The list of items to print.
    :param file: Stream to print to, stdout by default.
    """
    if items:
        print(title, file=file)
        for item in items:
            print(item, file=file)
        print(file=file)
