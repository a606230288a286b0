"""Allow ``python -m conway``."""

from .frontends.tkinter_gui import main

raise SystemExit(main())
