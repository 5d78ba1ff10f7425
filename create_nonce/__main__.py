import sys

from create_nonce.cli import main

sys.exit(main())
