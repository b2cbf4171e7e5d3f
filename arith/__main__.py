import sys

from arith.repl import main

sys.exit(main())
