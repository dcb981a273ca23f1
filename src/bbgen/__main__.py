from bbgen.cli import app

app()
