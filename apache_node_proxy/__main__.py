"""Enable the use of ``python -m apache_node_proxy``."""

import sys

from apache_node_proxy.cli import main

if __name__ == "__main__":
    sys.exit(main())
