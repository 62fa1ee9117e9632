import sys

from colorpicker.run_app import main

sys.exit(main())
