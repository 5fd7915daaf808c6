from rpncalc.repl import main

main()
