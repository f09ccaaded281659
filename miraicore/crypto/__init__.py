"""P-256 key agreement used by the login flow."""