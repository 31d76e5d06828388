"""decktransfer - Move bridge-deck cross-sections between CAD tools.

decktransfer takes a bridge-deck cross-section (an exterior boundary polygon plus
interior void polygons), derives its slab/web centerlines and cutlines, and writes
it to a JSON interchange file that an analysis-side adapter can load and replay
against its own object model.

Example:
    $ decktransfer info BoxGirder.json
    $ decktransfer import BoxGirder.json --target Deck1
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
