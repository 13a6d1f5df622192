from pathlib import Path

# Repo-root conventional directories/files (overrideable via browser.yaml)
CONFIG_DIR = Path("configs")
BROWSER_FILE = CONFIG_DIR / "browser.yaml"
TAXONOMY_DIR = CONFIG_DIR / "taxonomy"
SKILLS_FILE = TAXONOMY_DIR / "skills.yaml"
DOMAINS_FILE = TAXONOMY_DIR / "domains.yaml"

# Environment overrides
ENV_DEFAULT_TYPE = "TAXONOMY_DEFAULT_TYPE"
ENV_MATCH_SLUGS = "TAXONOMY_MATCH_SLUGS"
