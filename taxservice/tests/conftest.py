"""
Test configuration for the tax service tests.

sys.path is configured so 'from taxservice...' resolves whether pytest is run
from the project root or from inside taxservice/, with or without an
editable install.
"""
import sys
from pathlib import Path

_project_root = Path(__file__).parent.parent.parent    # .../package/

if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))
