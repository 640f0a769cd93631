import sys

from qr_verify.cli import main

sys.exit(main())
