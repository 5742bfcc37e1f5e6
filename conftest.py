import sys
from pathlib import Path

# allow running the suite from a checkout without installing
_SRC = Path(__file__).parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))
