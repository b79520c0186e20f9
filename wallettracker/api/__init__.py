"""HTTP API for the wallet tracker."""
