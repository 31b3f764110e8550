import argparse
import sys

import boto3


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Sign up and confirm a user, then check the post confirmation trigger added them to a group')
    parser.add_argument('--region', help='region where the user pool is deployed', required=True)
    parser.add_argument('--userpoolid', help='user pool to confirm the user in', required=True)
    parser.add_argument('--appclientid', help='application clientID for userpool', required=True)
    parser.add_argument('--username', help='username to sign up', required=True)
    parser.add_argument('--password', help='user password', required=True)
    parser.add_argument('--email', help='email attribute for the new user')
    parser.add_argument('--group', help='group the trigger is expected to add the user to', required=True)
    return parser.parse_args(argv)


class ConfirmationCheck:
    user_pool_id = ""
    app_client_id = ""
    user_name = ""
    password = ""
    email = None
    group = ""

    def __init__(self, args, cognito=None):
        self.user_pool_id = args.userpoolid
        self.app_client_id = args.appclientid
        self.user_name = args.username
        self.password = args.password
        self.email = args.email
        self.group = args.group
        self.cognito = cognito or boto3.client('cognito-idp', region_name=args.region)

    def sign_up(self):
        attributes = []
        if self.email:
            attributes.append({'Name': 'email', 'Value': self.email})
        self.cognito.sign_up(ClientId=self.app_client_id, Username=self.user_name,
            Password=self.password, UserAttributes=attributes)
        print(f'Signed up {self.user_name}')

    def confirm(self):
        # fires the PostConfirmation trigger
        self.cognito.admin_confirm_sign_up(UserPoolId=self.user_pool_id, Username=self.user_name)
        print(f'Confirmed {self.user_name}')

    def groups(self):
        names = []
        kwargs = {'UserPoolId': self.user_pool_id, 'Username': self.user_name}
        while True:
            results = self.cognito.admin_list_groups_for_user(**kwargs)
            names.extend(group['GroupName'] for group in results.get('Groups', []))
            if not results.get('NextToken'):
                return names
            kwargs['NextToken'] = results['NextToken']

    def in_group(self):
        groups = self.groups()
        print(f'{self.user_name} is in groups {groups}')
        return self.group in groups


def main(argv=None, cognito=None):
    check = ConfirmationCheck(parse_args(argv), cognito)
    check.sign_up()
    check.confirm()
    if check.in_group():
        print(f'{check.user_name} was added to {check.group}')
        return 0
    print(f'{check.user_name} was NOT added to {check.group}')
    return 1


if __name__ == "__main__":
    sys.exit(main())
