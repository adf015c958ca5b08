# SPDX-License-Identifier: MIT

from roadmap.cleanup import register_cleanup
from roadmap.initialize import initialize
from roadmap.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
