"""Entry point launcher - runs notify.cli as a module"""
import runpy

if __name__ == "__main__":
    # Run notify.cli as a module - this allows proper package imports without path hacks
    runpy.run_module("notify.cli", run_name="__main__")
