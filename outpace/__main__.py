from outpace.main import run

run()
