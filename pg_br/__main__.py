from pg_br.cli import run

run()
