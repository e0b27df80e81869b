from epochal.cli import app

app(prog_name="et")
