# -- HullGeometry Module Entry -- #

from kayakEngineering.Kayak.HullGeometry.runner import main

raise SystemExit(main())
