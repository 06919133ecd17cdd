from .demos.main import run

run()
