"""
High-score persistence for the terminal front-end.

The core never reads or writes this; only the presentation layer does.
"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

HIGHSCORE_FILENAME = "highscore.json"


def get_default_data_dir() -> Path:
    """
    Get the default data directory for the project.

    Returns:
        Path: Default data directory (project_root/data)
    """
    # Project root is one level up from the fivelines package
    current_file = Path(__file__)
    project_root = current_file.parent.parent
    data_dir = project_root / "data"
    data_dir.mkdir(exist_ok=True)
    return data_dir


class HighScoreStore:
    """Reads and writes the single best score as JSON."""

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the store.

        Args:
            data_dir: Directory holding highscore.json; defaults to the
                project data directory
        """
        self.data_dir = Path(data_dir) if data_dir is not None else get_default_data_dir()
        self.path = self.data_dir / HIGHSCORE_FILENAME

    def load(self) -> int:
        """
        Read the stored high score.

        Returns:
            int: Stored score, or 0 if the file is missing or unreadable
        """
        if not self.path.exists():
            return 0
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
            score = int(data.get("high_score", 0))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        return max(score, 0)

    def save(self, score: int) -> bool:
        """
        Store score if it beats the current high score.

        Args:
            score: Final or running score of the current game

        Returns:
            bool: True if a new high score was written
        """
        if score <= self.load():
            return False
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump({"high_score": int(score)}, f)
        logger.info("New high score %d saved to %s", score, self.path)
        return True
