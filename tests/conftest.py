pytest_plugins = ["csv_export.testing.fixtures"]
