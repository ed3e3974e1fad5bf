from .env import DEFAULT_ENV as DEFAULT_ENV
from .env import Env as Env
from .load_env import load_env as load_env
