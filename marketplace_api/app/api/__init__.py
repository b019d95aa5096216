"""
API package grouped by consumer role.

* ``buyer`` – favorites and reviews for shoppers.
* ``admin`` – seller management for platform administrators.
* ``seller`` – order management for shop owners.

``modules`` lists every mountable module; the application mounts them
in that order.
"""
