"""Run the bulletin board server: python -m bulletin_board"""

from bulletin_board.adapters.inbound.server import main

main()
