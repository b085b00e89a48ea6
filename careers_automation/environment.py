import os
from dotenv import load_dotenv

load_dotenv()

WORKSPACE_ROOT = os.path.dirname(os.path.abspath(__file__))
LOG_DIR = os.path.join(WORKSPACE_ROOT, 'logs', 'automation')
