from keycalc.cli import main

main(prog_name="keycalc")
