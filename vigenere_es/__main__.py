from vigenere_es.cli import main

main()
