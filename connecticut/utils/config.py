import os
from dotenv import load_dotenv
from pathlib import Path
import bittensor as bt

env_path = Path(__file__).parents[1] / '.env'
load_dotenv(dotenv_path=env_path)

__version__ = "0.1.0"

# GitHub API
GITHUB_API_URL = os.getenv('GITHUB_API_URL', 'https://api.github.com').rstrip('/')
GITHUB_TOKEN = os.getenv('GITHUB_TOKEN')
GITHUB_REQUEST_TIMEOUT = float(os.getenv('GITHUB_REQUEST_TIMEOUT', '30'))

# Only the first page of followers is read per identifier
FOLLOWERS_PER_PAGE = int(os.getenv('FOLLOWERS_PER_PAGE', '30'))

# Graph layout canvas
GRAPH_WIDTH = int(os.getenv('GRAPH_WIDTH', '500'))
GRAPH_HEIGHT = int(os.getenv('GRAPH_HEIGHT', '500'))

# Connections API
API_HOST = os.getenv('API_HOST', '0.0.0.0')
API_PORT = int(os.getenv('API_PORT', '8095'))

# Log out all non-sensitive config variables
bt.logging.info(f"GITHUB_API_URL: {GITHUB_API_URL}")
bt.logging.info(f"GITHUB_TOKEN configured: {bool(GITHUB_TOKEN)}")
bt.logging.info(f"GITHUB_REQUEST_TIMEOUT: {GITHUB_REQUEST_TIMEOUT}s")
bt.logging.info(f"FOLLOWERS_PER_PAGE: {FOLLOWERS_PER_PAGE}")
bt.logging.info(f"GRAPH_WIDTH: {GRAPH_WIDTH}")
bt.logging.info(f"GRAPH_HEIGHT: {GRAPH_HEIGHT}")
bt.logging.info(f"API_HOST: {API_HOST}")
bt.logging.info(f"API_PORT: {API_PORT}")
