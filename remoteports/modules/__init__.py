"""Remote scanning operations built on a RemoteChannel."""
