import sys

from edge_provisioner.main import main

if __name__ == "__main__":
    sys.exit(main())
