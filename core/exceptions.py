class ActiveEventExists(Exception):
    """Raised when creating an event while another one is still running
    and superseding is switched off (XC_SUPERSEDE_ACTIVE_EVENT = False)."""

    def __init__(self, event):
        self.event = event
        super().__init__(f"Event '{event.name}' is still active; end it first.")
