"""Abstract Factory demonstration over three fictional payment gateways."""
