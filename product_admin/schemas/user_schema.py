from product_admin.extensions import ma


class UserProfileSchema(ma.Schema):
    """Public view of a user, never includes the password hash"""

    id = ma.String()
    username = ma.String()
    name = ma.String()
    email = ma.Email()
