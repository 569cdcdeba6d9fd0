"""
Root conftest.py for the employee directory project.

Makes the service's ``app`` package importable when pytest is run from the
repository root without an editable install.
"""

import sys
from pathlib import Path

SERVICE_DIR = Path(__file__).parent / "services" / "employee-service"

if str(SERVICE_DIR) not in sys.path:
    sys.path.insert(0, str(SERVICE_DIR))
