from wikicomplete.main import run

run()
