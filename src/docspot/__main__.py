from docspot.cli import app

app()
