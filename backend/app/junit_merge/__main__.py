from junit_merge.cli import app

app(prog_name="junit-merge")
