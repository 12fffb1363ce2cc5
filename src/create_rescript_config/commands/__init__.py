"""Commands for create-rescript-config."""
