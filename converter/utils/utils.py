import logging
import coloredlogs
import os
from typing import List

from converter.extensions import log


def save_bytes(data: bytes, file_path: str) -> None:
    """
    Saves raw bytes to a file.
    """
    with open(file_path, 'wb') as file:
        file.write(data)

def load_bytes(file_path: str) -> bytes:
    """
    Loads raw bytes from a file.
    """
    with open(file_path, 'rb') as file:
        return file.read()

def get_file_names(folder_path: str) -> List[str]:
    """
    Retrieves the names of files in a specified folder.
    """
    if not os.path.exists(folder_path):
        log.error("Folder does not exist")
        return []

    return [item for item in os.listdir(folder_path) if os.path.isfile(os.path.join(folder_path, item))]


def create_logger(name: str, entity_name: str, level=logging.INFO):
    """Creates and configures a logger with colored output."""
    if level == logging.DEBUG:
        fmt=f'[%(asctime)s.%(msecs)03d][%(levelname)s][{entity_name}]: %(message)s'
    else:
        fmt=f'[%(asctime)s][%(levelname)s][{entity_name}]: %(message)s'
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    if not logger.handlers:
        coloredlogs.install(level=level, logger=logger, fmt=fmt)
    return logger
