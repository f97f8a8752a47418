from funlet_lsp.server import main

main()
