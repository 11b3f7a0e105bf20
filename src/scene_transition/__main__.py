import sys

from scene_transition.core.runtime.main_loop import main

sys.exit(main())
