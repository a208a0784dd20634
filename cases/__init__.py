"""
Workload package.

Each subpackage under :mod:`cases` supplies a PyTorch module (`model.py`) that
can be exported with :func:`scriptapp.export_script_module`, plus a
`profile.yaml` describing the inputs ``example-app`` should feed it.
"""
