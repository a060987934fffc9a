from sprig.repl import main

main()
