import os
import json
import logging

CONFIG_FILENAME = 'notetime_config.json'

DEFAULT_CONFIG = {
    'testing_mode': False,
    'strict_ranges': False,
    'confidence': 0.9,
    'log_file': 'notetime.log',
    'log_level': 'DEBUG'
}

def get_data_dir(create=True):
    """Get notetime data directory, optionally creating it"""
    data_dir = os.getenv('NOTETIME_DATA_DIR')
    if not data_dir:
        data_dir = os.path.expanduser('~/.config/notetime')
    if create:
        os.makedirs(data_dir, exist_ok=True)
    return data_dir

def load_config():
    """Load configuration, falling back to defaults for missing keys"""
    config = dict(DEFAULT_CONFIG)
    config_file = os.path.join(get_data_dir(create=False), CONFIG_FILENAME)
    try:
        with open(config_file, 'r') as f:
            stored = json.load(f)
    except FileNotFoundError:
        return config
    except (OSError, ValueError) as e:
        logging.getLogger('config').warning(f"Error loading config {config_file}: {e}")
        return config

    if isinstance(stored, dict):
        config.update({k: v for k, v in stored.items() if k in DEFAULT_CONFIG})
    return config

def get_testing_mode():
    """Check if testing mode is enabled"""
    return bool(load_config().get('testing_mode', False))
