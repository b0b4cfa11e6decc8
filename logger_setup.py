# logger_setup.py

import copy
import json
import logging
import os

DEFAULT_CONFIG = {
    "run_id": "default",
    "master_seed": None,
    "fps": 60,
    "window": {
        "width": 1000,
        "height": 1000,
        "resizable": True,
        "title": "Heartdrift",
    },
    "fonts": ["Comic Sans MS", "Georgia", "Trebuchet MS"],
    "font_size": 75,
    "image_paths": {},
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s [%(levelname)s] %(message)s",
        "to_file": False,
    },
}


def _merge(base, overrides):
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path='config.json'):
    """
    Loads the run configuration, layered over DEFAULT_CONFIG.

    A missing file yields the defaults untouched; a malformed file raises
    json.JSONDecodeError so the run stops before a window opens.
    """
    if not os.path.exists(config_path):
        return copy.deepcopy(DEFAULT_CONFIG)
    with open(config_path, 'r', encoding='utf-8') as f:
        overrides = json.load(f)
    return _merge(DEFAULT_CONFIG, overrides)


def setup_logging(config):
    """
    Sets up logging for the application.

    Configures a dedicated application logger (not the root logger) so pygame
    and OpenGL chatter stays out of the output. Console output is always on;
    a run-specific log file is written under runs/<run_id>/ when
    logging.to_file is set.

    Data Contract:
    - Inputs: config (dict) - merged configuration from load_config().
    - Outputs: the configured "heartdrift" logger.
    - Side Effects:
        - Replaces any handlers previously attached to the logger.
        - Creates the run directory when file logging is enabled.
    """
    log_config = config['logging']

    # --- Get a dedicated logger for the application ---
    logger = logging.getLogger("heartdrift")
    logger.setLevel(log_config['level'])
    logger.propagate = False

    formatter = logging.Formatter(log_config['format'])

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    log_file = None
    if log_config.get('to_file'):
        log_dir = os.path.join('runs', config['run_id'])
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, 'heartdrift.log')
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized. Run ID: {config['run_id']}. Log file: {log_file}")
    return logger
