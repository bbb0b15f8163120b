from cli import run_server

run_server("github")
