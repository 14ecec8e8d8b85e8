"""Discord chat frontend for the waitlist server."""
