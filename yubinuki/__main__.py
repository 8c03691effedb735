# =======================================================================================
# yubinuki/__main__.py - python -m yubinuki
# =======================================================================================
import sys
from .main import main

sys.exit(main())
