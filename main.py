from workforce.config import Settings
from workforce.main import create_app

app = create_app(Settings.from_env())
