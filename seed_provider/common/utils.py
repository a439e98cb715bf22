"""
Utility functions for the seed provider.
"""
import json
import logging
from typing import Dict, Any, Optional
import requests
import yaml
from seed_provider.common.config import CLIENT_TIMEOUT

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)


def make_http_request(url: str, method: str = "GET") -> Dict:
    """Make an HTTP request to a given URL."""
    try:
        if method.upper() == "GET":
            response = requests.get(url, timeout=CLIENT_TIMEOUT)
        else:
            raise ValueError(f"Unsupported HTTP method: {method}")

        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        logging.error(f"HTTP request failed: {e}")
        return {"success": False, "error": str(e)}


def load_json_file(file_path: str) -> Dict:
    """Load a JSON file."""
    try:
        with open(file_path, 'r') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logging.error(f"Failed to load JSON file {file_path}: {e}")
        return {}


def load_yaml_file(file_path: str) -> Dict:
    """Load a YAML file."""
    try:
        with open(file_path, 'r') as f:
            return yaml.safe_load(f) or {}
    except (FileNotFoundError, yaml.YAMLError) as e:
        logging.error(f"Failed to load YAML file {file_path}: {e}")
        return {}


def extract_seed_provider_parameters(document: Any) -> Dict[str, str]:
    """
    Flatten seed provider parameters into a string-keyed map of strings.

    Accepts either a cassandra.yaml style document, where the parameters
    live under seed_provider[0].parameters as a list of single-key maps,
    or a flat mapping of parameter names to values.

    Args:
        document: Parsed YAML or JSON document

    Returns:
        Dictionary of parameter name to string value
    """
    if not isinstance(document, dict):
        return {}

    if 'seed_provider' in document:
        providers = document.get('seed_provider') or []
        if isinstance(providers, dict):
            providers = [providers]
        if not providers or not isinstance(providers[0], dict):
            return {}
        parameters = providers[0].get('parameters') or {}
    else:
        parameters = document

    if isinstance(parameters, dict):
        parameters = [parameters]

    result = {}
    for entry in parameters:
        if not isinstance(entry, dict):
            continue
        for key, value in entry.items():
            if value is not None:
                result[str(key)] = str(value)
    return result


def load_parameters(file_path: str) -> Dict[str, str]:
    """Load seed provider parameters from a YAML or JSON file."""
    if file_path.endswith('.json'):
        document = load_json_file(file_path)
    else:
        document = load_yaml_file(file_path)
    return extract_seed_provider_parameters(document)


def merge_parameters(config_file: Optional[str], overrides: Dict[str, Any]) -> Dict[str, str]:
    """
    Combine parameters from a file with explicitly given values.

    Args:
        config_file: Optional YAML or JSON parameters file
        overrides: Parameter values that take precedence; None values are ignored

    Returns:
        Dictionary of parameter name to string value
    """
    parameters = load_parameters(config_file) if config_file else {}
    for key, value in overrides.items():
        if value is not None:
            parameters[key] = str(value)
    return parameters
