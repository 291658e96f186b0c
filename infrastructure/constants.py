from pathlib import Path

# Repo-root conventional directories/files
CONFIG_DIR = Path("configs")
EVALUATION_FILE = CONFIG_DIR / "evaluation.yaml"
