"""SAD entry assembly: maps a master bill and its declarations to an XmlNode tree.

Pure function of its inputs; the generation date is passed in so the same
inputs always produce the same document. Every constant of the customs schema
(regime, ports, countries, units, currency, terms) is fixed here.
"""

import logging
from datetime import date, datetime, timezone

from customs_entry.document_assembler.tree import XmlNode, element, text_element
from customs_entry.schemas.declaration import Declaration, Item, Packages
from customs_entry.schemas.master_bill import Container, MasterBill, MasterBillPayload
from customs_entry.schemas.party import PartyPayload
from customs_entry.services.tariff_service import TariffCatalog

logger = logging.getLogger("customs.assembler")

ROOT_TAG = "SADEntry"
REGIME = "IM1"
BROKER_IMPORTER_NUMBER = "20005264"
EXPORT_COUNTRY = "USA"
IMPORT_COUNTRY = "USA"
ORIGIN_COUNTRY = "USA"
SEA_MODE = "SEA"
SEA_DISCHARGE_PORT = "KYGEC"
DEFAULT_DISCHARGE_PORT = "KYGCM"
BILL_TYPE = "CONSOLIDATED"
WEIGHT_UNIT = "LB"
VOLUME_UNIT = "CF"
DEFAULT_QTY_UNIT = "LB"
CATEGORY_OF_GOODS = "1"
MONEY_DECLARED_FLAG = "N"
CURRENCY = "USD"
TERMS_OF_DELIVERY = "FOB"
DEFAULT_PROCEDURE = "HOME"


def discharge_port(transport_mode: str | None) -> str:
    return SEA_DISCHARGE_PORT if transport_mode == SEA_MODE else DEFAULT_DISCHARGE_PORT


def resolve_unit(item: Item, tariffs: TariffCatalog) -> str:
    """Tariff definition unit, then the line's own unit, then the default."""
    return tariffs.unit_for(item.code) or item.unit or DEFAULT_QTY_UNIT


def exporter_block(exporter: PartyPayload) -> XmlNode:
    """A number reference when the exporter has a tax number, else its full address."""
    if exporter.number:
        return element("Exporter", text_element("Number", exporter.number))

    return element(
        "Exporter",
        text_element("Name", exporter.name),
        text_element("Address", exporter.address),
        text_element("City", exporter.city),
        text_element("State", exporter.state),
        text_element("PostalCode", exporter.postalcode),
        text_element("Country", exporter.country),
        text_element("Phone", exporter.phone),
    )


def packages_block(packages: Packages) -> XmlNode:
    return element(
        "Packages",
        text_element("PkgCount", packages.pkg_count),
        text_element("PkgType", packages.pkg_type),
        text_element("GrossWt", packages.gross_wt),
        text_element("GrossWtUnit", WEIGHT_UNIT),
        text_element("GrossVol", packages.gross_vol),
        text_element("GrossVolUnit", VOLUME_UNIT),
        text_element("Contents", packages.contents),
        text_element("CategoryOfGoods", CATEGORY_OF_GOODS),
    )


def container_block(container: Container) -> XmlNode:
    return element(
        "Container",
        text_element("ContainerNumber", container.container_number),
        text_element("ContainerType", container.container_type),
        text_element("SealNumber", container.seal_number),
        text_element("DockReceipt", container.dock_receipt),
        text_element("MarksAndNumbers", container.marks_numbers),
        text_element("CubicSize", container.volume),
        text_element("CubicUnit", VOLUME_UNIT),
        text_element("GrossWt", container.weight),
        text_element("GrossWtUnit", WEIGHT_UNIT),
    )


def tariff_line_block(item: Item, importer_number: str, tariffs: TariffCatalog) -> XmlNode:
    return element(
        "Items",
        text_element("Code", item.code),
        text_element("Desc", item.desc),
        text_element("Origin", ORIGIN_COUNTRY),
        text_element("Qty", item.qty),
        text_element("QtyUnit", resolve_unit(item, tariffs)),
        text_element("Cost", item.cost),
        text_element("Insurance", item.insurance),
        text_element("Freight", item.freight),
        text_element("InvNumber", item.inv_number),
        element(
            "Procedure",
            text_element("Code", item.procedure or DEFAULT_PROCEDURE),
            text_element("ImporterNumber", importer_number),
        ),
    )


def consolidated_item_block(declaration: Declaration, tariffs: TariffCatalog) -> XmlNode:
    importer_number = declaration.importer.number or ""
    valuation = declaration.valuation

    return element(
        "ConsolidatedItem",
        element("Importer", text_element("Number", importer_number)),
        exporter_block(declaration.exporter),
        element("Finance"),
        text_element("BillNumber", declaration.bill_number),
        packages_block(declaration.packages),
        element(
            "Valuation",
            text_element("Currency", CURRENCY),
            text_element("NetCost", valuation.net_cost),
            text_element("NetInsurance", valuation.net_insurance),
            text_element("NetFreight", valuation.net_freight),
            text_element("TermsOfDelivery", TERMS_OF_DELIVERY),
        ),
        *(tariff_line_block(item, importer_number, tariffs) for item in declaration.items),
        text_element("MoneyDeclaredFlag", MONEY_DECLARED_FLAG),
    )


def assemble(
    master_bill: MasterBill | MasterBillPayload,
    declarations: list[Declaration],
    tariffs: TariffCatalog | None = None,
    generated_on: date | None = None,
) -> XmlNode:
    """Build the SAD entry tree for ``declarations`` under ``master_bill``.

    Declarations appear in the order given, one ConsolidatedItem each.
    ``generated_on`` defaults to today's UTC date.
    """
    if tariffs is None:
        tariffs = TariffCatalog()
    if generated_on is None:
        generated_on = datetime.now(timezone.utc).date()

    consignment = master_bill.consignment
    shipment = master_bill.shipment

    root = element(
        ROOT_TAG,
        text_element("Date", generated_on.isoformat()),
        text_element("Regime", REGIME),
        element("Importer", text_element("Number", BROKER_IMPORTER_NUMBER)),
        exporter_block(master_bill.exporter),
        element("Finance"),
        element(
            "Consignment",
            text_element("DepartureDate", consignment.departure_date),
            text_element("ArrivalDate", consignment.arrival_date),
            text_element("ExportCountry", EXPORT_COUNTRY),
            text_element("ImportCountry", IMPORT_COUNTRY),
            text_element("ShippingPort", consignment.shipping_port),
            text_element("DischargePort", discharge_port(consignment.transport_mode)),
            text_element("TransportMode", consignment.transport_mode),
        ),
        element(
            "Shipment",
            text_element("VesselCode", shipment.vessel_code),
            text_element("VoyageNo", shipment.voyage_no),
            text_element("ShippingAgent", shipment.shipping_agent),
            text_element("BillNumber", shipment.bill_number),
            text_element("BillType", BILL_TYPE),
        ),
        *(container_block(c) for c in master_bill.containers),
        packages_block(master_bill.packages),
        text_element("MoneyDeclaredFlag", MONEY_DECLARED_FLAG),
        element(
            "ConsolidatedShipment",
            *(consolidated_item_block(d, tariffs) for d in declarations),
        ),
    )

    logger.debug(
        "Assembled %s with %d consolidated items and %d containers",
        ROOT_TAG, len(declarations), len(master_bill.containers),
    )
    return root
