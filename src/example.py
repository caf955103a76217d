from pathlib import Path
from tempfile import TemporaryDirectory

from fileconf import Config, load_config, save_config

with TemporaryDirectory() as tmp:
    for suffix in (".toml", ".json", ".yaml"):
        path = Path(tmp) / f"app{suffix}"
        save_config(path, Config(database_url="postgres://localhost/app", port=5432, debug=True))

        config = load_config(path, Config)
        print(f"{path.name}: {config}")
        print(path.read_text())
