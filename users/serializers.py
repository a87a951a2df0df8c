from rest_framework import serializers
from users.models import Profile


class ProfileSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(source='user.id', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    first_name = serializers.CharField(source='user.first_name', read_only=True)
    last_name = serializers.CharField(source='user.last_name', read_only=True)

    class Meta:
        model = Profile
        fields = ['id', 'user_id', 'username', 'first_name', 'last_name', 'role',
                  'phone_number', 'license_number', 'bio']
        read_only_fields = ['id']

    def validate_role(self, value):
        if self.instance is not None and self.instance.role == 'admin':
            if value != 'admin':
                raise serializers.ValidationError("Admins cannot change their own role.")
            return value
        # Admin is granted from the back office only.
        if value not in ('customer', 'owner'):
            raise serializers.ValidationError("Role can only be set to 'customer' or 'owner'.")
        return value
