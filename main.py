"""
ContactMgr — CLI Entry Point

Usage:
  # Save the sample contact and print everything stored
  python main.py
  python main.py demo

  # Add a contact
  python main.py add Moo Mee --email moo@something.com --phone 888776543

  # Print all contacts
  python main.py list
"""

import argparse
import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("contactmgr")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="ContactMgr — store and list contacts in a relational database"
    )
    parser.add_argument(
        "--env-file", default=None, help="Load configuration from this file instead of .env"
    )
    subparsers = parser.add_subparsers(dest="command")

    # demo command
    subparsers.add_parser("demo", help="Save the sample contact, then list all contacts")

    # add command
    add_parser = subparsers.add_parser("add", help="Add a contact")
    add_parser.add_argument("first_name", help="First name")
    add_parser.add_argument("last_name", help="Last name")
    add_parser.add_argument("--email", default=None, help="Email address")
    add_parser.add_argument("--phone", type=int, default=None, help="Phone number (digits only)")

    # list command
    subparsers.add_parser("list", help="Print all contacts")

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "demo"
    return args


def print_contacts(contacts):
    for contact in contacts:
        print(contact)


def run_demo(container):
    from contactmgr.domain.entities.contact import ContactBuilder

    contact = (
        ContactBuilder("Moo", "Mee")
        .with_email("moo@something.com")
        .with_phone(888776543)
        .build()
    )
    contact_id = container.repository.save(contact)
    logger.info(f"Sample contact saved with id={contact_id}")

    print_contacts(container.list_contacts_use_case.execute().contacts)


def run_add(container, first_name, last_name, email, phone):
    from contactmgr.use_cases.add_contact import AddContactRequest

    response = container.add_contact_use_case.execute(
        AddContactRequest(first_name=first_name, last_name=last_name, email=email, phone=phone)
    )
    print(response.contact_id)


def run_list(container):
    print_contacts(container.list_contacts_use_case.execute().contacts)


def main(argv=None):
    args = parse_args(argv)

    from contactmgr.infrastructure.config import Config
    from contactmgr.infrastructure.container import Container

    config = Config.from_env(args.env_file)
    container = Container(config)

    try:
        if args.command == "demo":
            run_demo(container)

        elif args.command == "add":
            run_add(container, args.first_name, args.last_name, args.email, args.phone)

        elif args.command == "list":
            run_list(container)
    finally:
        container.close()


if __name__ == "__main__":
    main()
