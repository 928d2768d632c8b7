# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .app import main

main()
