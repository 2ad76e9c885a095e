import sys

from word_builder.cli import main

sys.exit(main())
