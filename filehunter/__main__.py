import sys
from filehunter.cli import main

sys.exit(main())
