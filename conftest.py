# Lets pytest import the `example` folder the same way `python -m unittest` does.
