from setupscan.cli import app

app()
