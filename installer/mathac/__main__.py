import sys

from mathac.main import main

sys.exit(main())
