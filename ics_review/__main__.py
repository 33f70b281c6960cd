import sys

from ics_review.cli import main

sys.exit(main())
