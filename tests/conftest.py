import os
import sys

# Ensure src package path precedes any installed copies
SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ('OPENWEATHER_API_KEY', 'CLIWEATHER_CITY', 'CLIWEATHER_UNITS',
                 'OPENWEATHER_BASE_URL', 'CLIWEATHER_TIMEOUT'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('CLIWEATHER_CONFIG', str(tmp_path / 'config.txt'))
    # keep load_dotenv from picking up a developer's .env
    monkeypatch.chdir(tmp_path)
