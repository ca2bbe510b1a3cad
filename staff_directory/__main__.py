from staff_directory.main import run

run()
