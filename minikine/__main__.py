import sys

from minikine.cli import main

sys.exit(main())
