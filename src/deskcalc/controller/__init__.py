"""
The CONTROLLER layer turns button presses into state changes.
It owns the arithmetic engine and the label -> action dispatch,
and it is the only place where failures become the "Error" display state.
"""
