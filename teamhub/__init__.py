"""Team workspace API package.

Holds the domain entities, persistence layer, use cases and HTTP interface of
the service. The package re-exports nothing; import from the layer modules.
"""
