import sys

from torrentinfo.main import main

sys.exit(main())
