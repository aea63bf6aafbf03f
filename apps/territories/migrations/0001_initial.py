from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Territory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('region', models.CharField(max_length=100)),
                ('manager', models.CharField(blank=True, max_length=200)),
                ('revenue_target', models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ('revenue_current', models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ('accounts', models.PositiveIntegerField(default=0)),
                ('opportunities', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name_plural': 'territories',
                'ordering': ['region', 'name'],
            },
        ),
        migrations.CreateModel(
            name='SalesRep',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('role', models.CharField(choices=[('territory_manager', 'Territory Manager'), ('account_executive', 'Account Executive'), ('sales_development_rep', 'Sales Development Rep')], default='account_executive', max_length=30)),
                ('quota', models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ('achieved', models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ('territories', models.ManyToManyField(blank=True, related_name='sales_reps', to='territories.territory')),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='TerritoryAssignmentRequest',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected')], default='pending', max_length=20)),
                ('reason', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('resolved_at', models.DateTimeField(blank=True, null=True)),
                ('requested_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='territory_requests', to=settings.AUTH_USER_MODEL)),
                ('requested_for', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assignment_requests', to='territories.salesrep')),
                ('resolved_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='resolved_territory_requests', to=settings.AUTH_USER_MODEL)),
                ('territory', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assignment_requests', to='territories.territory')),
            ],
            options={
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='AccountOwnership',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('account_name', models.CharField(max_length=200)),
                ('assigned_date', models.DateField()),
                ('last_interaction_date', models.DateField(blank=True, null=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='accounts', to='territories.salesrep')),
                ('territory', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='account_ownerships', to='territories.territory')),
            ],
            options={
                'ordering': ['account_name'],
            },
        ),
    ]
