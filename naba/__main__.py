from naba.main import run

run()
