import sys

from regdump.main import main

sys.exit(main(["regdump", *sys.argv[1:]]))
