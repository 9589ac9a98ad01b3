from sumit.cli.main import main

main(prog_name="sumit")
