# (c) Copyright IBM Corp. 2025

from typing import Any, Dict

import yaml

from sparkprobe.log import logger


def read_config_section(file_path: str, section: str) -> Dict[str, Any]:
    """
    Reads one top level section of a YAML configuration file.

    A missing, unreadable or malformed file is logged and yields an empty
    section, as does a section that is not a mapping.

    @param file_path: path of the YAML file, may be empty
    @param section: name of the top level key, e.g. "probe"
    @return: the section as a dictionary
    """
    if not file_path:
        return {}

    try:
        with open(file_path, "r") as config_file:
            data = yaml.safe_load(config_file)
    except OSError as e:
        logger.warning(f"read_config_section: can't read {file_path}: {e}")
        return {}
    except yaml.YAMLError as e:
        logger.warning(f"read_config_section: {file_path} is not valid YAML: {e}")
        return {}

    if not isinstance(data, dict):
        logger.debug(f"read_config_section: {file_path} holds no mapping")
        return {}

    value = data.get(section)
    if not isinstance(value, dict):
        logger.debug(f"read_config_section: no {section} section in {file_path}")
        return {}
    return value
