import sys
from landing_synth.cli import main

sys.exit(main())
