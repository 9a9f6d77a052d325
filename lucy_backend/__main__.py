from lucy_backend.server import run

run()
