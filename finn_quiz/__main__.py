from .cli import main

main(prog_name="finn-quiz")
