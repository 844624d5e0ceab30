"""salmon_run — program salmon up a river grid with a tiny movement language.

Sub-packages:

  config      – board constants and run config dataclasses.
  domain      – grid vocabulary, levels, snapshots and the interpreter.
  lang        – parser, statement tree, bytecode and compiler.
  io          – level files, Parquet schemas and output paths.
  simulation  – headless tick driver and trace persistence.

``session`` ties compilation to the running grid; ``run_game`` is the CLI.
"""
