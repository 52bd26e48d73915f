import os
import sys
from pathlib import Path

# Image tests assume the default tile size and palette
os.environ.setdefault("MINES_TILE_PX", "32")
os.environ.setdefault("MINES_THEME", "light")

sys.path.append(str(Path(__file__).resolve().parents[1]))
