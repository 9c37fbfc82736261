from molmeta.cli import app

app(prog_name="molmeta")
